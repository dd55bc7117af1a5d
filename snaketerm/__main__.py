from snaketerm.cli.play import main

if __name__ == "__main__":
    main()
