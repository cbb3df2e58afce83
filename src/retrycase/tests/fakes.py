"""Scripted strategies and operations for exercising the retry loops."""

from __future__ import annotations

from collections.abc import Iterable

from retrycase import Err, Ok, Result
from retrycase.runtime.retrying import Delay


class ScriptedBackOff:
    """Strategy answering a fixed script, then repeating its last answer."""

    def __init__(self, *answers: Delay, log: list[str] | None = None) -> None:
        self.answers = answers or (0.0,)
        self.log = log if log is not None else []
        self.resets = 0
        self.queries = 0

    def reset(self) -> None:
        self.resets += 1
        self.queries = 0
        self.log.append("reset")

    def next_backoff(self) -> Delay:
        answer = self.answers[min(self.queries, len(self.answers) - 1)]
        self.queries += 1
        self.log.append(f"next:{answer!r}")
        return answer


class ScriptedOperation:
    """Operation returning Err for each scripted error, then Ok(value).

    With ``forever=True`` every call fails with ``"e<call number>"``.
    """

    def __init__(
        self,
        errors: Iterable[object] = (),
        *,
        value: object = None,
        forever: bool = False,
        log: list[str] | None = None,
    ) -> None:
        self.errors = list(errors)
        self.value = value
        self.forever = forever
        self.calls = 0
        self.log = log if log is not None else []
        self.__name__ = "scripted"

    def _next(self) -> Result[object, object]:
        self.calls += 1
        self.log.append(f"call:{self.calls}")
        if self.forever:
            return Err(f"e{self.calls}")
        if self.calls <= len(self.errors):
            return Err(self.errors[self.calls - 1])
        return Ok(self.value)

    def __call__(self) -> Result[object, object]:
        return self._next()


class AsyncScriptedOperation(ScriptedOperation):
    """Coroutine flavour of ScriptedOperation."""

    async def __call__(self) -> Result[object, object]:  # type: ignore[override]
        return self._next()
