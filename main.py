# main.py

from a2s_responder.main import run

if __name__ == "__main__":
    run()
