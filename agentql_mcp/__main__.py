from agentql_mcp.main import main

main()
