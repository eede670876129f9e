"""Literal diagnostic lines emitted by the ResolveAssemblyReference task."""

RESOLVED_FILE_PATH_IS = 'Resolved file path is "'
REFERENCE_FOUND_AT = 'Reference found at search path location "'
REQUIRED_BY = 'Required by "'

DEPENDENCY_PREFIXES = ("Dependency ", "Unified Dependency ")

NOT_COPY_LOCAL_BECAUSE_PRIVATE_METADATA = (
    'This reference is not "CopyLocal" because at least one source item had '
    '"Private" set to "false" and no source items had "Private" set to "true".'
)

PRIVATE_METADATA = "Private"


def extract_quoted(text: str, prefix: str) -> str | None:
    """Return the quoted value of a line like ``<prefix>value"``.

    The task usually terminates these sentences with a period after the
    closing quote; both forms are accepted. Returns None if the line does not
    start with prefix.
    """
    if not text.startswith(prefix):
        return None
    value = text[len(prefix) :]
    if value.endswith('".'):
        return value[:-2]
    if value.endswith('"'):
        return value[:-1]
    return value


def is_dependency_record(name: str) -> bool:
    """Return True if a Results entry describes a transitive dependency."""
    return name.startswith(DEPENDENCY_PREFIXES)
