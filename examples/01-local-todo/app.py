from tododesk import App

# Todos live in ~/.config/TodoDesk/todos.json
app = App(store="local")

if __name__ == "__main__":
    app.run()
