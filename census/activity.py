import logging
from datetime import datetime, timedelta, timezone

import requests

from census.errors import SchemaDriftError

log = logging.getLogger(__name__)

HEADER_LAST_MODIFIED = "Last-Modified"
LAST_MODIFIED_FORMAT = "%a, %d %b %Y %H:%M:%S"
# HTTP dates are always sent in GMT, any other zone means the header changed
LAST_MODIFIED_ZONES = ("GMT", "UTC")
# A Realm Reborn launch day, old enough to always read as inactive
FALLBACK_LAST_MODIFIED = "Sat, 24 Aug 2013 00:00:01 GMT"

ACTIVITY_RANGE = timedelta(days=30)
DEFAULT_TIMEOUT = 10

STATUS_ACTIVE = "ACTIVE"
STATUS_INACTIVE = "INACTIVE"
STATUS_DELETED = "DELETED"


def head_probe(timeout=DEFAULT_TIMEOUT, session=None):
    """Build a probe that reads the Last-Modified header of a URL.

    Only a HEAD request is made.  A missing header raises KeyError, which
    the resolver treats like any other probe failure.
    """
    http = session or requests

    def _probe(url):
        response = http.head(url, timeout=timeout, allow_redirects=True)
        response.raise_for_status()
        return response.headers[HEADER_LAST_MODIFIED]
    return _probe


def parse_last_modified(value, character_id):
    stamp, _, zone = value.strip().rpartition(" ")
    if zone not in LAST_MODIFIED_ZONES:
        raise SchemaDriftError(
            character_id,
            "Unexpected timezone '%s' in 'Last-Modified' header '%s'"
            % (zone, value))
    try:
        parsed = datetime.strptime(stamp, LAST_MODIFIED_FORMAT)
    except ValueError:
        raise SchemaDriftError(
            character_id,
            "Could not parse 'Last-Modified' header '%s' from full body image"
            % value)
    return parsed.replace(tzinfo=timezone.utc)


def resolve_last_modified(url, character_id, probe):
    header = None
    try:
        header = probe(url)
    except Exception as e:
        log.warning(
            "Setting last-active date to ARR launch date due to an error "
            "loading character %s's profile image: %s", character_id, e)
    if header is None:
        header = FALLBACK_LAST_MODIFIED
    return parse_last_modified(header, character_id)


def is_active(last_modified, now):
    # Strictly after the cutoff, a timestamp exactly 30 days old is inactive
    return last_modified > now - ACTIVITY_RANGE


def activity_pass(struct, last_modified, now):
    struct['image_last_modified'] = last_modified.isoformat()
    struct['is_active'] = is_active(last_modified, now)
    if struct['is_active']:
        struct['status'] = STATUS_ACTIVE
    else:
        struct['status'] = STATUS_INACTIVE
