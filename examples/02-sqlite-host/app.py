from tododesk import App


def main():
    # The SQLite database is owned by a child host process; the window talks
    # to it through the request/response bridge.
    app = App(store="remote", host="process", db_path="todos.db")
    app.run()


if __name__ == "__main__":
    main()
