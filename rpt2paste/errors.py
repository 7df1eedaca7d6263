"""Exceptions raised by the report-to-paste pipeline."""


class Rpt2PasteError(Exception):
    """Base class for all pipeline errors."""


class ProtocolError(Rpt2PasteError):
    """The event stream violates the component/pad nesting rules."""


class ReportSyntaxError(ProtocolError):
    """A report keyword is missing an operand or has a non-numeric one."""


class EmptyPadListError(Rpt2PasteError):
    """No dispensable pads remain after filtering."""
