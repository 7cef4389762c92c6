"""TitleFormatter: derives display titles from section and block keys.

Used when a label descriptor carries no ``_sectionTitle`` / ``_blockTitle``.
Handles the naming conventions form builders emit:

- Trailing role suffixes (e.g. "Applicant_Step" -> "Applicant",
  "Address-Block" -> "Address")
- snake_case and kebab-case (e.g. "contact_info" -> "Contact Info")
- camelCase and PascalCase (e.g. "projectDetails" -> "Project Details")
"""

from __future__ import annotations

import re

__all__ = ["TitleFormatter"]

# Suffixes that only describe the role of a section key
_SECTION_SUFFIX = re.compile(r"[_-](Step|Section|Form|Page)$", re.IGNORECASE)

# Suffixes that only describe the role of a block key
_BLOCK_SUFFIX = re.compile(
    r"[_-](Block|List|Group|Section|Container)$", re.IGNORECASE
)

# Matches snake_case and kebab-case separators, one at a time
_SEP = re.compile(r"[_-]")

# Matches camelCase boundary: lowercase letter followed by uppercase letter
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")

# First character of every word
_WORD_START = re.compile(r"\b\w", re.ASCII)


class TitleFormatter:
    """Turns raw keys into Title Case headings.

    Example usage:
        titles = TitleFormatter()
        titles.section("applicant_info_Step")   # "Applicant Info"
        titles.block("mailingAddress-Block")    # "Mailing Address"
    """

    def section(self, key: str) -> str:
        return self._format(_SECTION_SUFFIX.sub("", key))

    def block(self, key: str) -> str:
        # A key that is nothing but separators keeps its raw form
        return self._format(_BLOCK_SUFFIX.sub("", key)) or key

    def _format(self, stem: str) -> str:
        # Pass 1: separators become spaces
        s = _SEP.sub(" ", stem)

        # Pass 2: split camelCase (xY -> x Y)
        s = _LOWER_UPPER.sub(r"\1 \2", s)

        # Pass 3: capitalize the first letter of each word, rest untouched
        s = _WORD_START.sub(lambda m: m.group(0).upper(), s)

        return s.strip()
