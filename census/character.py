import sys
import json
import logging
from datetime import datetime, timezone

from universal.options import option_parser, exec_main
from universal.files import output_dir, json_filename
from census.schema import validate_against_schema
from census.loader import Found, DELETED
from census.loader import LodestonePageLoader, FilePageLoader
from census.layout import field_pass, affiliation_pass, portrait_url
from census.levels import level_pass
from census.companions import collection_pass
from census.badges import badge_pass, load_badge_rules
from census.activity import head_probe, resolve_last_modified, activity_pass
from census.activity import STATUS_DELETED, DEFAULT_TIMEOUT

DELETED_GROUP = "deleted"


def build_character(character_id, loader, probe=None, now=None, rules=None):
    """Build the census record for one character.

    ``loader`` supplies the profile page (or ``DELETED``), ``probe`` reads
    the portrait's Last-Modified header and ``now`` is the aware datetime
    the activity window is measured from.  A deleted character comes back
    as just its id and status.  SchemaDriftError is never caught here, a
    partially filled record is never returned.
    """
    struct = {'id': character_id}
    page = loader.get_character_page(character_id)
    if page is DELETED:
        struct['status'] = STATUS_DELETED
        return struct
    assert isinstance(page, Found), page
    if probe is None:
        probe = head_probe()
    if now is None:
        now = datetime.now(timezone.utc)
    if rules is None:
        rules = load_badge_rules()
    soup = page.document
    field_pass(struct, soup)
    affiliation_pass(struct, soup)
    last_modified = resolve_last_modified(
        portrait_url(soup, character_id), character_id, probe)
    level_pass(struct, soup)
    collection_pass(struct, soup)
    badge_pass(struct, rules)
    activity_pass(struct, last_modified, now)
    return struct


def parse_character(arg, options, loader, probe, rules):
    character_id = int(arg)
    if not options.stdout:
        sys.stderr.write("%s\n" % character_id)
    struct = build_character(character_id, loader, probe=probe, rules=rules)
    if not options.skip_schema:
        validate_against_schema(struct, "character.schema.json")
    if not options.dryrun:
        group = struct.get('realm', DELETED_GROUP)
        jsondir = output_dir(options.output, "characters", group)
        write_character(jsondir, struct)
    elif options.stdout:
        print(json.dumps(struct, indent=2, ensure_ascii=False))
    return struct


def write_character(jsondir, struct):
    print("character (%s): %s" % (
        struct['status'], struct.get('name', struct['id'])))
    filename = json_filename(jsondir, struct['id'])
    with open(filename, 'w', encoding="utf-8") as fp:
        json.dump(struct, fp, indent=4, ensure_ascii=False)


def main():
    parser = option_parser("usage: %prog [options] <character id> ...")
    parser.add_option(
        "--html-dir", dest="html_dir",
        help="Read saved Character-<id>.html pages from this directory "
             "instead of the Lodestone")
    parser.add_option(
        "-t", "--timeout", dest="timeout", type="float",
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds (default: %default)")
    (options, args) = parser.parse_args()
    for arg in args:
        if not arg.isdigit():
            parser.error("character ids must be integers: %s" % arg)
    logging.basicConfig(
        level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    if options.html_dir:
        loader = FilePageLoader(options.html_dir)
    else:
        loader = LodestonePageLoader(timeout=options.timeout)
    probe = head_probe(timeout=options.timeout)
    rules = load_badge_rules()

    def _parse(arg, options):
        parse_character(arg, options, loader, probe, rules)
    exec_main(options, args, _parse)


if __name__ == "__main__":
    main()
