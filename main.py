from prompt_library.main import create_app

app = create_app()
