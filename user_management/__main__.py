from user_management.main import main

main()
