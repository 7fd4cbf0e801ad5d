"""
Diagnostics sink used by the Sensu Go service and its route bindings. The `Diagnostic` protocol is the capability the service depends on: leveled error reports carrying key-value context, and derivation of a child sink with extra context. `LoggingDiagnostic` implements it on top of the standard logging module so every report lands in the service log with its context rendered as sorted `key=value` pairs.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol


class Diagnostic(Protocol):
    def with_context(self, **context: Any) -> "Diagnostic": ...
    def error(self, msg: str, exc: Optional[BaseException] = None, **context: Any) -> None: ...


def _format_context(context: Dict[str, Any]) -> str:
    return " ".join(f"{key}={context[key]}" for key in sorted(context))


class LoggingDiagnostic:

    def __init__(self, logger: logging.Logger, context: Optional[Dict[str, Any]] = None) -> None:
        self._logger = logger
        self._context: Dict[str, Any] = dict(context or {})

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def with_context(self, **context: Any) -> "LoggingDiagnostic":
        merged = dict(self._context)
        merged.update(context)
        return LoggingDiagnostic(self._logger, merged)

    def error(self, msg: str, exc: Optional[BaseException] = None, **context: Any) -> None:
        merged = dict(self._context)
        merged.update(context)
        if exc is not None:
            merged["err"] = exc
        rendered = _format_context(merged)
        if rendered:
            self._logger.error("%s %s", msg, rendered, exc_info=exc)
        else:
            self._logger.error("%s", msg, exc_info=exc)
