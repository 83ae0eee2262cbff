from ts.cli.app import main

main()
