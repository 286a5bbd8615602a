from scopex_rate_client.step import main

if __name__ == "__main__":
    main()
