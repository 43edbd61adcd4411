from dirtree.cli import main

main()
