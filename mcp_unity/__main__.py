from mcp_unity.server import main

if __name__ == "__main__":
    main()
