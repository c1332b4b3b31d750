"""Properties of this project and its most recent release."""

from __future__ import annotations

import io
import posixpath
from dataclasses import dataclass
from datetime import date
from typing import TextIO

from .printer import TabWriter

VERSION_TAG_PREFIX = "v"

_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun",
           "jul", "aug", "sep", "oct", "nov", "dec")


@dataclass(frozen=True)
class Properties:
    """Properties of a software package and its latest release."""

    name: str
    full_name: str
    description: str
    build_version: str = ""
    release_version: str = ""
    release_date: str = ""
    concept_doi: str = ""
    doi: str = ""
    zenodo_id: str = ""
    author: str = ""
    license_name: str = ""
    host: str = "github.com"

    def title(self) -> str:
        """Return the full project title."""
        return f"{self.name}: {self.description}"

    def is_release(self) -> bool:
        """Report whether the built version is a release."""
        return self.build_version == self.release_version

    def release_tag(self) -> str:
        """Return the tag of the most recent release."""
        return VERSION_TAG_PREFIX + self.release_version

    def module(self) -> str:
        """Return the module path."""
        return posixpath.join(self.host, self.full_name)

    def repository_url(self) -> str:
        """Return the URL of the hosted repository."""
        return "https://" + self.module()

    def release_url(self) -> str:
        """Return the URL of the release page."""
        return f"{self.repository_url()}/releases/tag/{self.release_tag()}"

    def release_time(self) -> date:
        """Return the release date; raises ValueError if malformed."""
        return date.fromisoformat(self.release_date)

    def doi_url(self) -> str:
        """Return the DOI URL of the most recent release."""
        return _doi_url(self.doi)

    def concept_doi_url(self) -> str:
        """Return the DOI URL covering all versions."""
        return _doi_url(self.concept_doi)

    def check_citable(self) -> None:
        """Raise ValueError unless a citation can be made for this build."""
        if not self.is_release():
            raise ValueError("cannot cite non-release version")

    def write_citation(self, w: TextIO) -> None:
        """Write a BibTeX citation for the most recent release to w."""
        try:
            released = self.release_time()
        except ValueError as err:
            raise ValueError(f"release date: {err}") from err

        tw = TabWriter(w, 1, 4, 1, " ")

        def field(key: str, value: str) -> None:
            tw.linef("    %s\t=\t%s,", key, value)

        def braced(key: str, value: str) -> None:
            field(key, "{" + value + "}")

        tw.linef("@misc{%s,", self.name)
        braced("title", self.title())
        braced("author", self.author)
        field("year", str(released.year))
        field("month", _MONTHS[released.month - 1])
        braced("howpublished", "Repository \\url{" + self.repository_url() + "}")
        braced("version", self.release_version)
        braced("license", self.license_name)
        braced("doi", self.doi)
        braced("url", self.doi_url())
        tw.linef("}")
        tw.flush()

    def citation(self) -> str:
        """Return a BibTeX citation for the most recent release."""
        buf = io.StringIO()
        self.write_citation(buf)
        return buf.getvalue()


def _doi_url(doi: str) -> str:
    return "https://doi.org/" + doi


META = Properties(
    name="addchain",
    full_name="addchain/addchain",
    description="Cryptographic Addition Chain Generation",
    build_version="",
    release_version="0.4.0",
    release_date="2021-10-30",
    concept_doi="10.5281/zenodo.4625263",
    doi="10.5281/zenodo.5622943",
    zenodo_id="5622943",
    author="addchain contributors",
    license_name="BSD 3-Clause License",
)
"""Properties of the current version of this package."""