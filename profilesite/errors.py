"""Exceptions raised by the profile site builder."""


class ProfileSiteError(Exception):
    """Base class for profile site errors."""


class MissingDocument(ProfileSiteError):
    """The data document could not be read or parsed."""

    def __init__(self, source, reason=""):
        self.source = str(source)
        self.reason = reason
        message = f"Could not load {self.source}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class UnknownSectionType(ProfileSiteError):
    """A section carries no type, or one with no template."""

    def __init__(self, section_id, section_type):
        self.section_id = section_id
        self.section_type = section_type
        super().__init__(
            f"Unknown section type {section_type!r} for section {section_id!r}"
        )
