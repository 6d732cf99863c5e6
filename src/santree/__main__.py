from santree.app import main

main()
