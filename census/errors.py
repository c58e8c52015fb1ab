class SchemaDriftError(ValueError):
    """The profile page no longer matches what the extractors expect.

    Raised for structural mismatches that need a code or table update
    rather than a retry: an unexpected number of job levels, a malformed
    level token, an unparseable Last-Modified header or a missing element.
    """

    def __init__(self, character_id, message):
        self.character_id = character_id
        super().__init__("Character %s: %s" % (character_id, message))
