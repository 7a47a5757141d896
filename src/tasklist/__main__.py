from tasklist.cli.main import main

main()
