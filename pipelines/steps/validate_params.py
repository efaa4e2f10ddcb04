from __future__ import annotations

from pipelines.runner import RunContext
from services.params import validate_params


class ValidateParams:
    name = "validate_params"

    def run(self, ctx: RunContext) -> RunContext:
        # Raises InvalidParameter before anything touches the network
        ctx.params = validate_params(ctx.params)
        return ctx
