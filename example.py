import requests
import json

from argparse import ArgumentParser
parser = ArgumentParser()
parser.add_argument("--server", default="127.0.0.1:1005")
args = parser.parse_args()

messages = [
    ("people-100", "messages-100", "Message 100"),
    ("people-100", "messages-101", "Message 101"),
    ("people-100", "messages-102", "Message 102"),
    ("people-100", "messages-103", "Message 103"),
    ("people-100", "messages-104", "Message 104"),
    ("people-100", "messages-105", "Message 105"),
    ("people-100", "messages-3500", "Message 3500"),
    ("people-200", "messages-500", "Message 500"),
    ("machines-10", "messages-3500", "Machine 101"),
    ("people-100-2020-05-01", "friends-2019-05-01", "1, 2"),
    ("people-100-2020-05-01", "friends-2020-06-01", "1, 2, 3"),
]

for partition_key, sort_key, value in messages:
    response = requests.post("http://{}/set/{}/{}".format(args.server, partition_key, sort_key), data=value)
    print(response.status_code)

print("Query begins asc")
url = "http://{}/query_begins/people-100/messages/asc".format(args.server)
response = requests.get(url)
print(url)
print(response.text)

print("Query begins desc")
url = "http://{}/query_begins/people-100/messages/desc".format(args.server)
print(url)
response = requests.get(url)
print(response.text)

print("messages between 101 and 105")
url = "http://{}/query_between/people-100/messages-101/messages-105/desc".format(args.server)
print(url)
response = requests.get(url)
print(response.text)

print("messages before 103")
url = "http://{}/query_before/people-100/messages-103/asc".format(args.server)
print(url)
response = requests.get(url)
print(response.text)

print("delete messages-102")
url = "http://{}/clear/people-100/messages-102".format(args.server)
response = requests.post(url)
print(url)
print(response.status_code)

print("messages after 101")
url = "http://{}/query_after/people-100/messages-101/asc".format(args.server)
print(url)
response = requests.get(url)
print(response.text)

print("partitions")
url = "http://{}/partitions".format(args.server)
response = requests.get(url)
print(json.loads(response.text))

print("index shape")
url = "http://{}/stats".format(args.server)
response = requests.get(url)
print(json.dumps(json.loads(response.text), indent=2))
