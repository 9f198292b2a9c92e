import argparse
import datetime
import random

DOMAINS = ["example.com", "mail.test.org", "corp.example.net"]
USERS = ["alice", "bob.smith", "ops+alerts", "j_doe", "svc-backup"]
PATHS = ["/", "/login", "/api/orders", "/static/app.js", "/health"]


def random_ip():
    return ".".join(str(random.randint(1, 254)) for _ in range(4))


def random_email():
    return f"{random.choice(USERS)}@{random.choice(DOMAINS)}"


def generate_sample_logs(filename="sample.log", target_lines=1000, seed=None):
    """
    Write a synthetic log mixing Apache access lines, ISO-timestamped
    application lines and lines with no extractable fields.
    """
    if seed is not None:
        random.seed(seed)

    current_time = datetime.datetime(2023, 10, 10, 13, 55, 1)

    with open(filename, "w", encoding="utf-8") as f:
        for _ in range(target_lines):
            current_time += datetime.timedelta(seconds=random.randint(1, 30))
            kind = random.choice(["apache", "app", "login", "noise"])

            if kind == "apache":
                ts = current_time.strftime("%d/%b/%Y:%H:%M:%S +0000")
                line = (
                    f'{random_ip()} - - [{ts}] "GET {random.choice(PATHS)} HTTP/1.1" '
                    f"{random.choice([200, 302, 404, 500])} {random.randint(0, 5000)}"
                )
                if random.random() < 0.3:
                    line += f" {random_email()}"
            elif kind == "app":
                ts = current_time.strftime("%Y-%m-%d %H:%M:%S")
                line = f"{ts} INFO mailer sent report to {random_email()}"
            elif kind == "login":
                ts = current_time.strftime("%Y-%m-%d %H:%M:%S")
                line = f"Login at {ts} from {random_ip()}"
            else:
                line = "heartbeat ok, no identifiers here."

            f.write(line + "\n")

    print(f"Generated {target_lines} lines in {filename}")


def main():
    parser = argparse.ArgumentParser(description="Generate a sample log file")
    parser.add_argument("-o", dest="output", default="sample.log")
    parser.add_argument("-n", dest="lines", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    generate_sample_logs(args.output, args.lines, args.seed)


if __name__ == "__main__":
    main()
