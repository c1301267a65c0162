"""Parser for Little Fighter 2 object data files."""
from .errors import ObjectDataError
from .element import BPoint, Bdy, CPoint, Element, Itr, OPoint, WPoint
from .frame import Frame
from .frames import Frames
from .header import Header, SpriteFile
from .kinds import (BdyKind, CPointKind, Effect, ItrKind, OPointFacing, OPointFacingDir,
                    OPointKind, WPointKind)
from .object_data import ObjectData
from .state import State
from .values import FrameNumber, FrameNumberNext, ObjectId, Pic, Wait, WeaponStrengthIndex
from .weapon_strength import WeaponStrength
