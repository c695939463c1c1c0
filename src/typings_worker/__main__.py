from typings_worker.cli import main

if __name__ == "__main__":
    main()
