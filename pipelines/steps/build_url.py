from __future__ import annotations

from config.settings import Settings
from pipelines.runner import RunContext
from services.url_builder import build_segmentation_url


class BuildSegmentationUrl:
    name = "build_url"

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def run(self, ctx: RunContext) -> RunContext:
        ctx.url = build_segmentation_url(ctx.params, self.settings)
        return ctx
