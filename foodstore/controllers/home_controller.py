from flask import render_template


def hello():
    return render_template("home/hello.html")
