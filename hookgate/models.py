"""
Response models for the authentication endpoints.
"""

from dataclasses import asdict, dataclass
from typing import Any

from hookgate.exceptions import ResponseFormatError


@dataclass(frozen=True)
class DashboardAccessOut:
    """
    One-time dashboard access grant for an application.

    Attributes
    ----------
    url : str
        Pre-authenticated URL of the application portal
    token : str
        Portal session token embedded in ``url``
    """

    url: str
    token: str

    @classmethod
    def from_dict(cls, data: Any) -> "DashboardAccessOut":
        """
        Build model from a decoded JSON response.

        Raises
        ------
        ResponseFormatError
            If ``data`` is not an object or a required field is missing
        """
        if not isinstance(data, dict):
            raise ResponseFormatError(
                f"Expected JSON object for DashboardAccessOut, got {type(data).__name__}"
            )

        missing = [name for name in ("url", "token") if name not in data]
        if missing:
            raise ResponseFormatError(
                f"Invalid DashboardAccessOut response: missing {', '.join(missing)}"
            )

        return cls(url=data["url"], token=data["token"])

    def to_dict(self) -> dict[str, str]:
        """Return model as a JSON-compatible dict."""
        return asdict(self)
