from myapp.main import main

main()
