"""
Frame state codes.

The state decides how an object behaves while in a frame. Most codes are
fixed, `8000` to `8099` transform the object into the object with id
`code - 8000`.
"""
from typing import Optional

from lf2_parse.kinds import CodedEnum, KindParseError, PARSE_ERRORS


class StateParseError(KindParseError):
    kind_name = 'State'


TRANSFORM_BASE = 8000
TRANSFORM_COUNT = 100

_STATES = [
    ('STANDING', 0),
    ('WALKING', 1),
    ('RUNNING', 2),
    ('ATTACKING', 3),
    ('JUMPING', 4),
    ('DASHING', 5),
    ('ROWING', 6),
    ('DEFEND', 7),
    ('BROKEN_DEFENCE', 8),
    ('CATCHING', 9),
    ('CAUGHT', 10),
    ('INJURED', 11),
    ('FALLING', 12),
    ('ICE', 13),
    ('LYING', 14),
    ('OTHER', 15),
    ('STUNNED', 16),
    ('DRINKING', 17),
    ('BURNING', 18),
    ('FIRE_RUN', 19),
    ('HIT_GROUND', 100),
    ('Z_MOVEMENT', 301),
    ('TELEPORT_NEAREST_ENEMY', 400),
    ('TELEPORT_FURTHEST_ALLY', 401),
    ('TRANSFORM_CHECK', 500),
    ('TRANSFORM', 501),
    ('LIGHT_WEAPON_IN_SKY', 1000),
    ('LIGHT_WEAPON_IN_HAND', 1001),
    ('LIGHT_WEAPON_BEING_THROWN', 1002),
    ('LIGHT_WEAPON_JUST_ON_GROUND', 1003),
    ('LIGHT_WEAPON_ON_GROUND', 1004),
    ('HEAL', 1700),
    ('HEAVY_WEAPON_IN_SKY', 2000),
    ('HEAVY_WEAPON_IN_HAND', 2001),
    ('HEAVY_WEAPON_ON_GROUND', 2004),
    ('BALL_FLYING', 3000),
    ('BALL_FLYING_HITTING', 3001),
    ('BALL_FLYING_HIT', 3002),
    ('BALL_FLYING_REBOUND', 3003),
    ('BALL_FLYING_DISAPPEAR', 3004),
    ('BALL_FLYING_NO_SHADOW', 3005),
    ('BALL_FLYING_PIERCING', 3006),
]
_STATES += [(f'TRANSFORM_{n:02}', TRANSFORM_BASE + n) for n in range(TRANSFORM_COUNT)]
_STATES += [
    ('LOUIS_TRANSFORM', 9995),
    ('LOUIS_TRANSFORM_SPAWN_ARMOUR', 9996),
    ('MESSAGE', 9997),
    ('DELETE_OBJECT', 9998),
    ('BROKEN_WEAPON', 9999),
]

State = CodedEnum('State', _STATES, module=__name__, qualname='State')
State.__doc__ = 'Behaviour mode of an object while it is in a frame.'
PARSE_ERRORS[State] = StateParseError


def transform_object_id(state: State) -> Optional[int]:
    """Object id a `TRANSFORM_NN` state transforms into, otherwise None."""
    if TRANSFORM_BASE <= state < TRANSFORM_BASE + TRANSFORM_COUNT:
        return state - TRANSFORM_BASE
    return None
