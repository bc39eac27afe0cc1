from rendezvous.app import main

main()
