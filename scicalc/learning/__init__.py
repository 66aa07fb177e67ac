"""Clustering, classification and regression for SciCalc.

- clustering: k-means (Lloyd) and DBSCAN
- classification: k-nearest neighbours, linear SVM/SVR by subgradient
  descent, Gaussian Naive Bayes
- regression: ordinary least squares line fit

Training never mutates the caller's dataset.
"""
