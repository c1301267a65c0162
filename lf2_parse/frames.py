import logging
from collections import defaultdict
from typing import Optional

from lf2_parse.errors import FrameNumberNonUnique
from lf2_parse.frame import Frame
from lf2_parse.grammar import Node, Rule
from lf2_parse.object_data_parser import parse_each

logger = logging.getLogger(__name__)

# LF2 itself stores at most 400 frames per object. Larger objects still parse.
FRAME_COUNT_HINT = 400


class Frames(list):
    """Ordered frames of an object. Frame numbers are unique."""

    @classmethod
    def from_node(cls, node: Node) -> 'Frames':
        nodes = []

        def parse_frame(frames, frame_node):
            frames.append(Frame.from_node(frame_node))
            nodes.append(frame_node)
            return frames

        frames = parse_each(cls(), node, Rule.FRAMES, parse_frame)
        frames._check_unique_numbers(nodes)

        logger.debug('Parsed %d frames', len(frames))
        if len(frames) > FRAME_COUNT_HINT:
            logger.warning('Object has %d frames, LF2 only loads the first %d',
                           len(frames), FRAME_COUNT_HINT)
        return frames

    def _check_unique_numbers(self, nodes):
        by_number = defaultdict(list)
        for frame, node in zip(self, nodes):
            by_number[frame.number].append(node)
        duplicates = sorted(number for number, group in by_number.items() if len(group) > 1)
        if duplicates:
            raise FrameNumberNonUnique(duplicates[0], by_number[duplicates[0]])

    def find(self, number: int) -> Optional[Frame]:
        """Returns the frame with the given number, or None."""
        for frame in self:
            if frame.number == number:
                return frame
        return None

    def __repr__(self):
        return f'Frames({list.__repr__(self)})'
