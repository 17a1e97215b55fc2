import os

# Widget tests must run without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
