"""Page loaders hand the builder either a parsed page or a deletion signal.

A loader is any object with ``get_character_page(character_id)`` returning
``Found(document)`` or ``DELETED``.  Loaders are expected to be safe to
share between threads; the builder never keeps one between calls.
"""
import os
from collections import namedtuple

import requests

from universal.utils import parse_html
from census.activity import DEFAULT_TIMEOUT

LODESTONE_CHARACTER_URL = "https://na.finalfantasyxiv.com/lodestone/character/%d/"
CHARACTER_FILE_PATTERN = "Character-%d.html"

Found = namedtuple("Found", ["document"])


class Deleted():
    def __repr__(self):
        return "<Deleted>"


DELETED = Deleted()


class LodestonePageLoader():
    def __init__(self, timeout=DEFAULT_TIMEOUT, session=None,
                 url_pattern=LODESTONE_CHARACTER_URL):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.url_pattern = url_pattern

    def get_character_page(self, character_id):
        response = self.session.get(
            self.url_pattern % character_id, timeout=self.timeout)
        if response.status_code == 404:
            return DELETED
        response.raise_for_status()
        return Found(parse_html(response.text))


class FilePageLoader():
    """Loads saved profile pages named Character-<id>.html from a directory."""

    def __init__(self, directory, pattern=CHARACTER_FILE_PATTERN):
        self.directory = directory
        self.pattern = pattern

    def get_character_page(self, character_id):
        filename = os.path.join(self.directory, self.pattern % character_id)
        with open(filename, encoding="utf-8") as fp:
            return Found(parse_html(fp.read()))
