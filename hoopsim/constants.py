# hoopsim/constants.py

APP_TITLE = "Hoop Shot Trajectory"
WIDTH, HEIGHT = 640, 640
FPS = 60
FONT_SIZE = 20

WHITE = (245, 245, 245)
BLACK = (0, 0, 0)
GRAY = (150, 150, 150)
SILVER = (200, 200, 200)
BLUE = (0, 0, 255)
ORANGE = (230, 150, 0)
RED = (255, 0, 0)
