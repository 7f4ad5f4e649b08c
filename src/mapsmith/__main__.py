from mapsmith.ui.cli import main


main()
