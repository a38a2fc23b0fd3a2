import os

# Physical and quantization settings for the printed relief.
# Every value here can be overridden per call through keyword arguments.

# Quantization: grayscale values in [0, INPUT_RANGE) map onto LEVELS layers
LEVELS = 16
INPUT_RANGE = 256

# Luma weights (no gamma correction)
RED_WEIGHT = 0.2989
GREEN_WEIGHT = 0.5870
BLUE_WEIGHT = 0.1140

# Printer geometry, in millimetres
BASE = 0.4   # the model always has a 0.4mm base under the shortest point
SCALE = 0.2  # height of one layer, also the x/y footprint of one pixel

# Output
DEFAULT_OUTPUT = 'lithophane.stl'
SOLID_NAME = 'lithograph'
BINARY_HEADER = b'Binary STL Writer'
BATCH_SIZE = 4096  # triangles packed per binary write

VERSION = '0.1.0'

# Upload form for the web front end, shipped as package data
TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')
