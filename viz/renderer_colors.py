# viz/renderer_colors.py
BG = "black"
TEXT = (235, 235, 235)
OVERLAY_BG = (0, 0, 0, 160)
