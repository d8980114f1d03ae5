#!/usr/bin/env python3
"""
Auto-Reload Troubleshooting Instructions for the Vibecode App
==============================================================

Prints the steps for getting the app to pick up the v11.4 auto-reload
system. Run this with: python reload_help.py
"""

import logging
import sys

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

RELOAD_VERSION = "11.4"

RELOAD_HELP = """
╔═══════════════════════════════════════════════════════════╗
║        AUTO-RELOAD SYSTEM NOW ACTIVE - v11.4             ║
╚═══════════════════════════════════════════════════════════╝

The app now has an AUTOMATIC RELOAD SYSTEM that will:
✓ Detect version changes
✓ Clear persisted data automatically
✓ Force reload with fresh mock data

IMMEDIATE FIX - Force App to Reload NOW:
----------------------------------------
1. CLOSE the Vibecode App completely on your device
2. REOPEN the Vibecode App
3. The app will automatically detect v11.4 and clear all data
4. Login as Peter: dennis@buildtrack.com / password: 123456
5. You will see 2 projects and 3 tasks!

WHY THIS WORKS:
---------------
- App now checks version on startup (v11.4)
- If version changed, it clears AsyncStorage
- This forces stores to reload with MOCK_DATA
- Dennis's projects & tasks are in MOCK_DATA

TROUBLESHOOTING:
----------------
If closing/reopening doesn't work:

OPTION 1: Clear App Data (Fastest)
iOS:
  - Settings → General → iPhone Storage → Vibecode App → Delete
  - Reinstall from TestFlight or App Store

Android:
  - Settings → Apps → Vibecode App → Storage → Clear Data
  - Force Stop → Reopen

OPTION 2: Clear Metro Cache
  cd /home/user/workspace
  rm -rf node_modules/.cache .expo
  bun start --clear

OPTION 3: Login/Logout
  - Login to any account
  - Tap Profile
  - Logout
  - Login as Peter

╔═══════════════════════════════════════════════════════════╗
║  Peter is FULLY SETUP in the code:                       ║
║  - 2 Projects assigned                                    ║
║  - 3 Tasks assigned                                       ║
║  - Just needs the app to reload!                          ║
╚═══════════════════════════════════════════════════════════╝
"""


def show_reload_help(stream=None):
    """Write the troubleshooting instructions to ``stream`` (stdout by default)."""
    if stream is None:
        stream = sys.stdout
    logger.debug(f"Showing reload help for v{RELOAD_VERSION}")
    print(RELOAD_HELP, file=stream, flush=True)


def main(argv=None) -> int:
    # Arguments are accepted and ignored
    show_reload_help()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
