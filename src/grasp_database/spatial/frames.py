"""Define constants related to named reference frames."""

DEFAULT_FRAME = "base_link"
"""Reference frame assumed when a pose is constructed without an explicit frame."""
