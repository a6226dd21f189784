from trenako_seeding.app import main

if __name__ == "__main__":
    main()
