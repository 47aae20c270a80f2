from thermocmd.cli.main import main

main()
