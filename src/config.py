TITLE = "Ortho Robot"
IDENTITY = "ortho_robot"
WIDTH = 1024
HEIGHT = 768
FULLSCREEN = False
FPS = 60
VSYNC = True
# Colors are written 0..255; the color boundary normalizes them for GL
BACKGROUND_COLOR = (179, 204, 255, 255)
SHADE_COLOR = (0, 0, 0)
SHADE_OPACITY = 0.3
# Print every translated color call (noisy, per frame)
COLOR_BOUNDARY_DEBUG = False
