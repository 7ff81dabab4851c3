from .cli import jvm

if __name__ == '__main__':
    jvm()
