"""Three-dimensional scenes: rotation, projection and arrow drawing."""