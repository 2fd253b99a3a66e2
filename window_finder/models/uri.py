"""Uri model shared by windows, workspaces and folder identifiers.

Only the parts the window lookups need are modelled: the five URI
components, conversion from and to filesystem paths, and a canonical
string form used for equality checks.
"""

import os
import re
from typing import Optional
from urllib.parse import quote, unquote, urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator


_DRIVE_PATH = re.compile(r"^/[a-zA-Z]:")


class Schemas:
    """Well known URI schemes."""

    FILE = "file"
    UNTITLED = "untitled"


class Uri(BaseModel):
    """Immutable uniform resource identifier.

    Examples:
        >>> uri = Uri.file("/home/me/project")
        >>> uri.scheme
        'file'
        >>> uri.to_string()
        'file:///home/me/project'
        >>> Uri.parse("vscode-remote://ssh-box/srv/app").authority
        'ssh-box'
    """

    model_config = ConfigDict(frozen=True)

    scheme: str = Field(..., pattern=r"^[a-zA-Z][a-zA-Z0-9+.-]*$")
    authority: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str, info) -> str:
        """Paths of URIs with an authority must be absolute."""
        if v and info.data.get("authority") and not v.startswith("/"):
            raise ValueError("path must begin with '/' when an authority is present")
        return v

    @classmethod
    def file(cls, path: str, separator: str = os.sep) -> "Uri":
        """Create a file URI from a filesystem path.

        Args:
            path: Absolute filesystem path (UNC paths keep their server as authority)
            separator: Native path separator; backslashes are only converted on
                platforms that use them

        Returns:
            Uri with scheme 'file'
        """
        if separator == "\\":
            path = path.replace("\\", "/")

        authority = ""
        if path.startswith("//"):
            idx = path.find("/", 2)
            if idx == -1:
                authority = path[2:]
                path = "/"
            else:
                authority = path[2:idx]
                path = path[idx:] or "/"

        if not path.startswith("/"):
            path = "/" + path

        return cls(scheme=Schemas.FILE, authority=authority, path=path)

    @classmethod
    def parse(cls, value: str) -> "Uri":
        """Parse a URI string such as 'file:///tmp/x' or 'https://host/p?q#f'.

        Raises:
            ValueError: If the string has no scheme
        """
        parts = urlsplit(value)
        if not parts.scheme:
            raise ValueError(f"Invalid URI '{value}': missing scheme")

        path = unquote(parts.path)
        if parts.scheme == Schemas.FILE and not path:
            path = "/"

        return cls(
            scheme=parts.scheme,
            authority=parts.netloc,
            path=path,
            query=unquote(parts.query),
            fragment=unquote(parts.fragment),
        )

    def to_fs_path(self, separator: str = os.sep) -> str:
        """Filesystem path of this URI using the given separator."""
        if self.authority and len(self.path) > 1 and self.scheme == Schemas.FILE:
            # UNC path: //server/share
            value = f"//{self.authority}{self.path}"
        elif _DRIVE_PATH.match(self.path):
            # /C:/x -> c:/x
            value = self.path[1].lower() + self.path[2:]
        else:
            value = self.path

        if separator == "\\":
            value = value.replace("/", "\\")
        return value

    @property
    def fs_path(self) -> str:
        """Filesystem path of this URI with native separators."""
        return self.to_fs_path()

    def to_string(self) -> str:
        """Canonical, percent-encoded string form.

        Scheme and authority are lower-cased, as is the drive letter of
        Windows style paths, so that equal resources produce equal strings.
        """
        result = [self.scheme.lower(), ":"]
        if self.authority or self.scheme == Schemas.FILE:
            result.append("//")
        if self.authority:
            result.append(quote(self.authority.lower(), safe="@:[]"))

        path = self.path
        if _DRIVE_PATH.match(path):
            path = "/" + path[1].lower() + path[2:]
        result.append(quote(path, safe="/:@!$&'()*+,;=~"))

        if self.query:
            result.append("?" + quote(self.query, safe="=&/:@"))
        if self.fragment:
            result.append("#" + quote(self.fragment, safe="/:@"))
        return "".join(result)

    def __str__(self) -> str:
        return self.to_string()


def parse_uri_or_path(value: str, separator: str = os.sep) -> Uri:
    """Parse a URI string, treating scheme-less input as a file path.

    Single letter schemes are drive letters ('C:\\work'), not URI schemes.
    """
    scheme = urlsplit(value).scheme
    if scheme and len(scheme) > 1:
        return Uri.parse(value)
    return Uri.file(value, separator=separator)


__all__ = ["Schemas", "Uri", "parse_uri_or_path"]
