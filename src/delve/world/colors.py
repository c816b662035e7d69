from typing import Tuple

Color = Tuple[int, int, int]

# RGB values shared with the renderer
WHITE: Color = (255, 255, 255)
DESATURATED_GREEN: Color = (63, 127, 63)
DARKER_GREEN: Color = (0, 127, 0)
VIOLET: Color = (127, 0, 255)
LIGHT_YELLOW: Color = (255, 255, 63)
SKY: Color = (0, 191, 255)
