"""
State-name canonicalization.

Canonical identifiers are lowercase and hyphenated, as used in the source
site's URLs (e.g. "kuala-lumpur", "negeri-sembilan").
"""

from typing import Dict


# Special-case renames applied after the generic transform
STATE_ALIASES: Dict[str, str] = {
    'malacca': 'melaka',
    'kualalumpur': 'kuala-lumpur',
    # Joint labels for the shared territory holiday collapse to one entry
    'putrajayaand-selangor': 'putrajaya',
    'putrajaya-and-selangor': 'putrajaya',
    'putrajaya-selangor': 'putrajaya',
}


def normalize_state(label: str) -> str:
    """
    Map a state label to its canonical identifier.

    Labels not in STATE_ALIASES pass through after lowercasing and
    replacing spaces with "-" and "&" with "and".

    Examples:
        >>> normalize_state("Kuala Lumpur")
        'kuala-lumpur'
        >>> normalize_state("Malacca")
        'melaka'
        >>> normalize_state("Putrajaya & Selangor")
        'putrajaya'
    """
    state = label.strip().lower()
    state = state.replace(' ', '-')
    state = state.replace('&', 'and')
    return STATE_ALIASES.get(state, state)
