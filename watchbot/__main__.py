from watchbot.app import main

main()
