"""Error types raised by the docs toolchain commands."""


class DocsKitError(Exception):
    """Base class for every expected failure of a docs command."""


class SpecFileNotFound(DocsKitError):
    """A spec file that a command needs could not be read."""


class SourceUnavailable(SpecFileNotFound):
    """The upstream spec is missing locally or could not be fetched."""


class DriftDetected(DocsKitError):
    """The published spec no longer matches the upstream source."""


class MalformedSchemaNode(DocsKitError):
    """A schema node has a shape the example synthesizer cannot use.

    Never leaves the generator: the node is replaced by a placeholder value.
    """
