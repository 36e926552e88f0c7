from talias.cli.main import main

main()
