from lanerunner.game import main

main()
