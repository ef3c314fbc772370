"""Analysis phase — solve the roof, lay out frames, resolve visibility."""

from __future__ import annotations
import logging

from steelbuilder.models import BuildingContext
from steelbuilder.core.roof import solve_roof
from steelbuilder.core.layout import compute_frame_layout
from steelbuilder.core.visibility import visibility_flags

logger = logging.getLogger(__name__)


class BuildingAnalyzer:
    """Derives the shared quantities every geometry rule reads."""

    def analyze(self, context: BuildingContext) -> None:
        """Run all analysis passes and populate the context."""
        config = context.config
        dims = config.dimensions
        roof = config.roof

        context.roof = solve_roof(dims.width, roof.pitch, roof.style, roof.asymmetric_offset)
        context.frames = compute_frame_layout(dims.length, context.frame_params)
        context.visibility = visibility_flags(config.ui.visibility_mode)

        logger.debug(
            "Analyzed %s roof: rise=%.3f, %d frames at %.3f spacing",
            roof.style.value, context.roof.rise,
            context.frames.num_frames, context.frames.frame_spacing,
        )
