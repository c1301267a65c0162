"""Shared sample object data for lf2-parse tests."""
from lf2_parse import grammar
from lf2_parse.grammar import Rule


HEADER_TEXT = r"""<bmp_begin>
name: Frozen
head: frozen\frozen_f.bmp
small: frozen\frozen_s.bmp
file(0-69): frozen\frozen_0.bmp  w: 79  h: 79  row: 10  col: 7
file(70-139): frozen\frozen_1.bmp  w: 79  h: 79  row: 10  col: 7
file(140-209): frozen\frozen_2.bmp  w: 79  h: 79  row: 10  col: 7
walking_frame_rate 3
walking_speed 5.000000
walking_speedz 2.570000
running_frame_rate 3
running_speed 11.000000
running_speedz 1.670000
heavy_walking_speed 3.700000
heavy_walking_speedz 1.900000
heavy_running_speed 7.000000
heavy_running_speedz 1.200000
jump_height -16.000000
jump_distance 10.000000
jump_distancez 3.750000
dash_height -11.500000
dash_distance 19.000000
dash_distancez 5.000000
rowing_height -2.000000
rowing_distance 6.000000
<bmp_end>
"""

STAND_FRAME_TEXT = """<frame> 0 Stand
   pic: 1  state: 0  wait: 3  next: 1  dvx: 0  dvy: 0  centerx: 39  centery: 79  hit_a: 60  hit_d: 110  hit_j: 210
   bdy:
      kind: 0  x: 0  y: 0  w: 30  h: 60
   bdy_end:
<frame_end>
"""

PUNCH_FRAME_TEXT = """<frame> 60 punch
   pic: 10  state: 3  wait: 1  next: -61  dvx: 2  dvy: 0  centerx: 39  centery: 79  mp: -20
   sound: data\\007.wav
   itr:
      kind: 0  x: 44  y: 29  w: 34  h: 18  dvx: 7  fall: 20  vrest: 15  bdefend: 16  injury: 25  effect: 1
   itr_end:
   bpoint:
      x: 40  y: 35
   bpoint_end:
   wpoint:
      kind: 1  x: 34  y: 41  weaponact: 24  attacking: 1  cover: 0  dvx: 0  dvy: 0
   wpoint_end:
   opoint:
      kind: 1  x: 50  y: 40  action: 0  dvx: 10  dvy: 0  oid: 209  facing: 21
   opoint_end:
<frame_end>
"""

CATCH_FRAME_TEXT = """<frame> 120 catching
   pic: 30  state: 9  wait: 2  next: 121
   cpoint:
      kind: 1  x: 58  y: 52  vaction: 131  aaction: 122  taction: -232  throwvx: 10  throwvy: -5  hurtable: 1  throwinjury: 20  dircontrol: 1
   cpoint_end:
   itr:
      kind: 1  x: 40  y: 16  w: 38  h: 65  vrest: 1  catchingact: 120 120  caughtact: 130 130
   itr_end:
<frame_end>
"""

WEAPON_STRENGTH_TEXT = """<weapon_strength_list>
   entry: 1 normal
      dvx: 8 fall: 40 vrest: 15 bdefend: 16 injury: 30
   entry: 2 jump
      dvx: 10 dvy: -3 fall: 70 arest: 20 bdefend: 16 injury: 40
<weapon_strength_list_end>
"""

OBJECT_TEXT = HEADER_TEXT + '\n' + STAND_FRAME_TEXT + '\n' + PUNCH_FRAME_TEXT + '\n' + CATCH_FRAME_TEXT

DUPLICATE_FRAMES_TEXT = """<frame> 5 first
   pic: 0  state: 0  wait: 1  next: 0
<frame_end>

<frame> 5 second
   pic: 1  state: 0  wait: 1  next: 0
<frame_end>
"""


def parse_node(rule, text):
    """Parses `text` as a single syntax tree node of `rule`."""
    return grammar.parse(rule, text)


def frame_text(number, name='frame', body='pic: 0  state: 0  wait: 1  next: 0'):
    return f'<frame> {number} {name}\n   {body}\n<frame_end>\n'


def element_node(text):
    return grammar.parse(Rule.ELEMENT, text)
