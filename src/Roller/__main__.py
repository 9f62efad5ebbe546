from Roller.cli import main

main()
