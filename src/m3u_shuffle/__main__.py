from m3u_shuffle.cli import run

if __name__ == "__main__":
    run()
