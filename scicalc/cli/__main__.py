from scicalc.cli.main import main

main()
