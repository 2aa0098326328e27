"""
Entry Point Script (Bootstrap)
==============================
Development runner for the GUI without installing the package.

It adds the 'src' directory to the Python path so that imports like
'from pixelpi.model...' resolve from a plain checkout.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

appid = 'PixelPi.Demo'  # Arbitrary string, groups the taskbar icon on Windows
try:
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows
    pass

from pixelpi.app.main import main

if __name__ == "__main__":
    sys.exit(main())
