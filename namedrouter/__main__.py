from namedrouter.console.artisan import main

main()
