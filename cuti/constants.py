"""
Centralized constants for the holiday scraper.

Import from here to ensure consistency between stages.
"""

# Label for the federal holiday set. Never fetched on its own: national
# holidays show up on every state page.
NATIONAL = 'national'

# Fixed processing order
STATES = [
    NATIONAL,
    'johor', 'kedah', 'kelantan', 'kuala-lumpur',
    'labuan', 'melaka', 'negeri-sembilan', 'pahang',
    'penang', 'perak', 'perlis', 'putrajaya',
    'sabah', 'sarawak', 'selangor', 'terengganu',
]

# Source site
BASE_URL = 'https://publicholidays.com.my'
URL_TEMPLATE = '{base_url}/{state}/{year}-dates/'
TABLE_SELECTOR = 'table.publicholidays'
TABLE_CLASS = 'publicholidays'

DEFAULT_YEAR = 2025
DEFAULT_TIMEOUT_SECONDS = 20.0

# Rows shorter than this are noise (date, day, name)
MIN_ROW_CELLS = 3

# strptime layouts tried in order. PARSE_YEAR is appended before parsing; it is
# a leap year so "29 Feb" parses and is checked against the real year afterwards
PARSE_YEAR = 2000
DATE_LAYOUTS = ['%d %b %Y', '%d %B %Y']

# Subresources aborted by the browser session
BLOCKED_RESOURCE_TYPES = ['image', 'font', 'stylesheet']
BLOCKED_URL_PATTERNS = [
    '*.png', '*.jpg', '*.jpeg', '*.gif',
    '*.woff', '*.ttf', '*.svg', '*.css',
]

# Output
OUTPUT_FORMATS = ['json', 'csv']
CSV_HEADER = ['Date', 'Day', 'Name', 'States']
CSV_STATE_SEPARATOR = ';'
