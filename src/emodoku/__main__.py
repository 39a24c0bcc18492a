from emodoku.app import main

main()
