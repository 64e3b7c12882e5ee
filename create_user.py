from app import create_app
from modules.auth.users import create_user, set_password


def main(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description='Create the catalog user or rotate its password.')
    parser.add_argument('username', help='Username (the login page always uses "admin")')
    parser.add_argument('password', help='Password')
    parser.add_argument('--rotate', action='store_true', help='Change the password of an existing user')

    args = parser.parse_args(argv)
    app = create_app()

    with app.app_context():
        try:
            if args.rotate:
                set_password(args.username, args.password)
                print(f"Password changed for: {args.username}")
            else:
                create_user(args.username, args.password)
                print(f"Created user: {args.username}")
        except (ValueError, LookupError) as exc:
            print(f"Error: {exc}")
            return 1
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
