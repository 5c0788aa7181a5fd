"""Timeline reveal: show the filtered events one by one, ten per second."""
from dataclasses import dataclass

TICK_SECONDS = 0.1


@dataclass(frozen=True)
class AnimationState:
    index: int = 0
    running: bool = False


STOPPED = AnimationState()


def start(state: AnimationState, total: int) -> AnimationState:
    # only from stopped, and only with something to show
    if state.running or total == 0:
        return state
    return AnimationState(index=0, running=True)


def tick(state: AnimationState, total: int) -> AnimationState:
    if not state.running:
        return state
    nxt = state.index + 1
    if nxt >= total:
        return STOPPED
    return AnimationState(index=nxt, running=True)


def stop(state: AnimationState) -> AnimationState:
    return STOPPED


def visible(events, state: AnimationState):
    if state.running:
        return events[:state.index]
    return events
