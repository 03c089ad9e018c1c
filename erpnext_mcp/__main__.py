import sys

from erpnext_mcp.main_mcp import main

sys.exit(main())
