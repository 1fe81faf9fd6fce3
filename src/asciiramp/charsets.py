# Darkest-looking to lightest-looking; ends in blanks
REFERENCE = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`      "

# Ten-step ramp for coarse output
SHORT = "@%#*+=-:. "

RAMPS = {"reference": REFERENCE, "short": SHORT}
