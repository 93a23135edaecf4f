"""
Exception hierarchy for the CRUD harness

Assertion-type failures subclass AssertionError so pytest reports them as
test failures. Transport and parse problems stay outside that branch so a
network issue never reads like a logic issue.
"""

from typing import Iterable, Optional


class HarnessError(Exception):
    """Base class for harness errors that are not assertion failures"""


class TransportError(HarnessError):
    """The HTTP exchange itself failed (connection, timeout, protocol)"""

    def __init__(self, method: str, url: str, reason: str, trace_id: Optional[str] = None):
        self.method = method
        self.url = url
        self.reason = reason
        self.trace_id = trace_id
        super().__init__(f"{method} {url} failed: {reason}" + (f" [trace {trace_id}]" if trace_id else ""))


class ResponseParseError(HarnessError):
    """Response body was empty, not JSON, or not the expected shape"""

    def __init__(self, method: str, url: str, status_code: int, reason: str, trace_id: Optional[str] = None):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self.trace_id = trace_id
        super().__init__(
            f"{method} {url} returned an unusable body (HTTP {status_code}): {reason}"
            + (f" [trace {trace_id}]" if trace_id else "")
        )


class MissingFixtureStateError(AssertionError):
    """A dependent step ran before the step that populates its fixture state"""

    def __init__(self, dependency: str, required_by: Optional[str] = None):
        self.dependency = dependency
        self.required_by = required_by
        who = f" (required by {required_by})" if required_by else ""
        super().__init__(f"Missing fixture state: {dependency} was not set{who}")


class PriorityDeclarationError(HarnessError, ValueError):
    """Invalid or conflicting priority declaration"""


class UndeclaredPriorityError(HarnessError):
    """Strict mode found test cases with no declared priority"""

    def __init__(self, case_ids: Iterable[str]):
        self.case_ids = list(case_ids)
        super().__init__(
            "No priority declared for: " + ", ".join(self.case_ids)
        )
