from __future__ import annotations

import logging


DOCS_BASE_URL = "https://docs.aws.amazon.com/guardduty/latest/ug/guardduty_finding-types-"

# Finding category (lower-cased) -> docs page. Unlisted categories get no link
# rather than a guessed one; add new GuardDuty categories here explicitly.
FINDING_GROUPS = {
    "iamuser": "iam",
    "ec2": "ec2",
    "s3": "s3",
    "kubernetes": "kubernetes",
}

logger = logging.getLogger(__name__)


def resolve_link(finding_type: str) -> str:
    """Map a GuardDuty finding type to its documentation URL.

    "UnauthorizedAccess:EC2/SSHBruteForce" becomes
    ".../guardduty_finding-types-ec2.html#unauthorizedaccess-ec2-sshbruteforce".
    Returns an empty string when the category is missing or unknown.
    """
    lowered = finding_type.lower()
    segment = _category_segment(lowered)
    if segment is None:
        logger.error("Couldn't match a finding group in: %s", finding_type)
        return ""

    start, end = segment
    category = lowered[start + 1 : end]
    group = FINDING_GROUPS.get(category)
    if group is None:
        logger.error("Got unexpected finding group %r in: %s", category, finding_type)
        return ""

    anchor = f"{lowered[:start]}-{group}-{lowered[end + 1:]}"
    return f"{DOCS_BASE_URL}{group}.html#{anchor}"


def _category_segment(value: str) -> tuple[int, int] | None:
    """Index of the first ":" and the first "/" after it, if both exist."""
    colon = value.find(":")
    if colon == -1:
        return None
    slash = value.find("/", colon + 1)
    if slash == -1:
        return None
    return colon, slash
