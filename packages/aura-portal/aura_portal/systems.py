"""System factory driving a portal transition from the engine clock."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from aura_portal.machine import StageCallback, TransitionStateMachine

if TYPE_CHECKING:
    from aura import TickContext, World


def make_portal_system(
    machine: TransitionStateMachine,
    on_stage_change: StageCallback | None = None,
    on_terminal: Callable[[], None] | None = None,
    stop_on_finish: bool = True,
) -> Callable[[World, TickContext], None]:
    """Return a system that starts ``machine`` on its first tick and advances it.

    Time is measured from the tick the machine started on. Once the terminal
    trigger has fired the engine is asked to stop, unless ``stop_on_finish``
    is False. A stopped machine is left alone.
    """
    origin: list[float] = []

    def portal_system(world: World, ctx: TickContext) -> None:
        if machine.stopped:
            return
        if not origin:
            origin.append(ctx.elapsed_ms)
            machine.start(on_stage_change=on_stage_change, on_terminal=on_terminal)
        machine.advance(ctx.elapsed_ms - origin[0])
        if machine.finished and stop_on_finish:
            ctx.request_stop()

    return portal_system
