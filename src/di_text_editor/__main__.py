from di_text_editor.main import main

main()
