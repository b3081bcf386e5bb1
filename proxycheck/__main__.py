from proxycheck.cli import main

main()
