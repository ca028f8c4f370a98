"""Shared regular expressions for field rules."""

from __future__ import annotations

import re

EMAIL_RULE_PATTERN = re.compile(r"^[^\n\r\u2028\u2029]+@[^\n\r\u2028\u2029]+$")
"""At least one character, an ``@`` and at least one more character, none of them line terminators."""

PHONE_RULE_PATTERN = re.compile(r"^\d{10}$", re.ASCII)
"""Exactly ten decimal digits."""
