"""
Entry Point Script (Bootstrap)
==============================
Development runner that does not require installing the package.

It prepends the 'src' directory to 'sys.path' so that
'from springconstant...' imports resolve from a plain checkout.

Usage:
    $ python run.py --output-dir figures
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from springconstant.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
