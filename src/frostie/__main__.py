from frostie.cli import main

main()
