"""Badge flags inferred from owned minions and mounts.

Purchases, subscription tenure and content milestones are not visible on
a profile, but many of them hand out a unique minion or mount.  The rule
table in ``census/data/badges.json`` maps each such item to the flag it
certifies.  A flag is set when any of its rows matches, so a milestone
without one guaranteed reward (finishing Stormblood) is simply listed
once per qualifying item.
"""
from census.data import get_data

BADGE_KINDS = ("minion", "mount")


def load_badge_rules(data_name="badges.json"):
    rules = get_data(data_name)
    for rule in rules:
        assert rule['kind'] in BADGE_KINDS, rule
        assert rule['item'], rule
    return rules


def derive_badges(minions, mounts, rules):
    owned = {
        "minion": set(minions),
        "mount": set(mounts),
    }
    badges = {}
    for rule in rules:
        badges.setdefault(rule['flag'], False)
        if rule['item'] in owned[rule['kind']]:
            badges[rule['flag']] = True
    return badges


def badge_pass(struct, rules):
    struct['badges'] = derive_badges(struct['minions'], struct['mounts'], rules)
