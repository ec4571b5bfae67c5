"""Config settings – EncoderSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_querydsl.config.settings.base import Settings
from mp_querydsl.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class EncoderSettings(Settings):
    """Knobs for :class:`~mp_querydsl.encoding.QueryEncoder`.

    ``emit_minimum_should_match`` is off by default so bool queries render
    exactly as the canonical encoder does, without the threshold.  Turning
    it on writes ``minimum_should_match`` right after ``should``.

    ``ensure_ascii`` and ``indent`` only affect :meth:`QueryEncoder.dumps`;
    the JSON value produced by ``encode_*`` is the same either way.
    """

    _prefix: ClassVar[str] = "QUERYDSL"

    emit_minimum_should_match: bool = False
    ensure_ascii: bool = False
    indent: int | None = None
    log_encoding: bool = False

    def _validate(self) -> None:
        if self.indent is not None and self.indent < 0:
            raise InvalidSettingValueError("indent", self.indent, "must be >= 0")


__all__ = ["EncoderSettings"]
