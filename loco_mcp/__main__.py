from loco_mcp.server import main

main()
