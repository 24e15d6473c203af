from specdoc.api import start_server

if __name__ == "__main__":
    # Run the server in the main thread (enables hot-reloading in development mode)
    start_server()
