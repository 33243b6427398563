"""Exceptions raised by the toolkit core."""


class TermgridError(Exception):
    """Base class for termgrid errors."""


class WidgetOwnershipError(TermgridError, ValueError):
    """A widget was attached somewhere the ownership rules forbid.

    Raised when adding a widget that already has a parent, or when an add
    would make the tree cyclic.
    """
