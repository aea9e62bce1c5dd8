from lyrics_picker.cli import main

main()
