from swagger_explorer.main import run

run()
