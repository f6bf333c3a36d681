from wtimer.main import main

main()
