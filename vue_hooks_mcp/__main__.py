from vue_hooks_mcp.server_side.server import main

main()
