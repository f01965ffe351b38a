from osrel.cli.app import main

main()
