"""POST /api/morph — match two shapes and render frames along the morph."""

from __future__ import annotations

import asyncio
import logging
import time

from fastapi import APIRouter

from vectormorph.config import settings
from vectormorph.engine.animator import MorphAnimator, MorphFrame, create_animator
from vectormorph.engine.config import MorphConfig
from vectormorph.models.requests import MorphRequest
from vectormorph.models.responses import FrameResponse, MorphResponse
from vectormorph.models.shapes import CommandModel
from vectormorph.svg.serializer import describe, serialize_frame, to_path_data

logger = logging.getLogger(__name__)

router = APIRouter()


def _frame_response(frame: MorphFrame, req: MorphRequest, width: float, height: float) -> FrameResponse:
    return FrameResponse(
        fraction=frame.fraction,
        paired=[CommandModel.from_command(c) for c in frame.paired],
        unpaired_start=[CommandModel.from_command(c) for c in frame.unpaired_start],
        unpaired_end=[CommandModel.from_command(c) for c in frame.unpaired_end],
        paired_d=to_path_data(frame.paired, req.precision),
        unpaired_start_d=to_path_data(frame.unpaired_start, req.precision),
        unpaired_end_d=to_path_data(frame.unpaired_end, req.precision),
        start_alpha=frame.start_alpha,
        end_alpha=frame.end_alpha,
        svg=serialize_frame(frame, width, height, precision=req.precision) if req.include_svg else None,
    )


def _render_frames(animator: MorphAnimator, fractions: list[float]) -> list[MorphFrame]:
    return [animator.frame(f) for f in fractions]


@router.post("/morph", response_model=MorphResponse)
async def morph(req: MorphRequest) -> MorphResponse:
    start = time.perf_counter()

    config = MorphConfig(
        width=req.width,
        height=req.height,
        smoothness=req.smoothness or settings.default_smoothness,
        precompute=settings.precompute,
        fade_breakpoint=req.breakpoint or settings.default_breakpoint,
    )
    animator = await create_animator(req.start.to_source(), req.end.to_source(), config)
    path_data = animator.path_data

    # Cache misses interpolate on the CPU; keep them off the event loop too
    loop = asyncio.get_running_loop()
    frames = await loop.run_in_executor(None, _render_frames, animator, req.fractions)
    if frames and logger.isEnabledFor(logging.DEBUG):
        logger.debug("Paired shape at %.3f:\n%s", frames[0].fraction, describe(frames[0].paired))

    elapsed = (time.perf_counter() - start) * 1000

    return MorphResponse(
        width=path_data.width,
        height=path_data.height,
        paired_count=len(path_data.paired_subpaths),
        unpaired_start_count=len(path_data.unpaired_start_subpaths),
        unpaired_end_count=len(path_data.unpaired_end_subpaths),
        frames=[_frame_response(f, req, path_data.width, path_data.height) for f in frames],
        processing_time_ms=round(elapsed, 1),
    )
