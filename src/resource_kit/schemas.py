"""
Operation Arguments - per-call configuration bag for transport operations

Callers may pass an OperationArgs, a plain dict with the same keys, or None.
"""

from typing import Any, Callable, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class OperationArgs(BaseModel):
    """
    Completion callbacks and paging/timeout options for one operation.

    `load` is invoked once per resulting Item, `error` once on failure.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    load: Optional[Callable[..., Any]] = Field(
        None,
        description="Invoked once per resulting Item"
    )
    error: Optional[Callable[..., Any]] = Field(
        None,
        description="Invoked on failure; the argument depends on the transport"
    )
    start: int = Field(0, ge=0, description="Offset of the first Item in the page")
    count: Optional[int] = Field(None, ge=0, description="Page size; unbounded when absent")
    timeout: Optional[int] = Field(
        None,
        gt=0,
        description="Remote only: milliseconds before the request is aborted"
    )

    @classmethod
    def coerce(cls, args: Union["OperationArgs", Dict[str, Any], None]) -> "OperationArgs":
        """Accept an OperationArgs, a dict, or None."""
        if args is None:
            return cls()
        if isinstance(args, cls):
            return args
        return cls.model_validate(args)

    def window(self, length: int) -> range:
        """Positions covered by start/count in a collection of `length` Items."""
        end = length
        if self.count is not None:
            end = min(length, self.start + self.count)
        return range(self.start, end)

    def range_header(self) -> Optional[str]:
        """Value of the Range header for remote paging, None when count is unset or zero."""
        if not self.count:
            return None
        return f"{self.start}-{self.start + self.count - 1}"
