from colordle.main import main

main()
