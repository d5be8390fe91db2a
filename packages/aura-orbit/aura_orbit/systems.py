"""System factory for sphere animation."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from aura_orbit.animator import FrameAnimator
from aura_orbit.components import DreamSphere, RenderParameters

if TYPE_CHECKING:
    from aura import EntityId, TickContext, World


def make_frame_system(
    on_render: Callable[[World, TickContext, EntityId, RenderParameters], None] | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system that animates every entity with a DreamSphere and a FrameAnimator.

    The resulting RenderParameters replace the entity's previous ones, so a
    renderer can query ``(DreamSphere, RenderParameters)`` after the tick.
    """

    def frame_system(world: World, ctx: TickContext) -> None:
        for eid, (sphere, animator) in world.query(DreamSphere, FrameAnimator):
            params = animator.advance(ctx.elapsed, sphere)
            world.attach(eid, params)
            if on_render is not None:
                on_render(world, ctx, eid, params)

    return frame_system
