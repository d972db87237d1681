from tilt_jump.viewer import main


if __name__ == "__main__":
    main()
